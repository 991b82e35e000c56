"""pillargen: L-system driven procedural pillar meshes."""

__version__ = "0.2.0"
