"""Vector and rotation math, polyhedron meshes, shader stage lookup and deferred float uniforms."""

__version__ = "0.1.0"

__all__ = ["vectors", "angle", "undex", "polyhedra", "shaders", "uniforms"]