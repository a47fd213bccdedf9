"""Shader stage selection and shader build errors."""

from __future__ import annotations

import enum


class ShaderType(enum.IntEnum):
    """Shader stages, valued as their GL enumerants."""

    VERTEX = 0x8B31
    GEOMETRY = 0x8DD9
    FRAGMENT = 0x8B30


_EXTENSIONS = {
    ".vert": ShaderType.VERTEX,
    ".geom": ShaderType.GEOMETRY,
    ".frag": ShaderType.FRAGMENT,
}


class InvalidFileExtensionError(ValueError):
    """The file name does not name a known shader stage."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File '{path}' has an invalid extension.")
        self.path = path


class ShaderCompileError(RuntimeError):
    """Compiling one shader source produced a log."""

    def __init__(self, log: str, path: str) -> None:
        super().__init__(f"Log returned from compiling File '{path}'.\n\n{log}")
        self.log = log
        self.path = path


class ProgramLinkError(RuntimeError):
    """Linking a shader program produced a log."""

    def __init__(self, log: str) -> None:
        super().__init__(f"Log returned from compiling File.\n\n{log}")
        self.log = log


def shader_type_for(path: str) -> ShaderType:
    """The shader stage a file is for, judged by its extension."""
    for extension, shader_type in _EXTENSIONS.items():
        if path.endswith(extension):
            return shader_type
    raise InvalidFileExtensionError(path)