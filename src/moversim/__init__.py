"""
moversim: evolving geometric organisms on a torus.

Movers are bodies made of a core circle and tangent limbs that drift
across a wrap-around plane. When two touch, the one closing in more
slowly is destroyed. Survivors periodically lay eggs carrying a mutated
copy of their shape; eggs hatch once their site is clear.

Shape is the only heritable trait, so the population's limb layouts
drift under selection by collision.
"""

__version__ = "0.1.0"
