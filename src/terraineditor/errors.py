"""Exceptions raised by the editors, the preview and the generator boundary."""


class TerrainEditorError(Exception):
    """Base class for all errors raised by terraineditor."""


class MalformedBufferError(TerrainEditorError, ValueError):
    """A flat coordinate buffer does not have the expected grouping."""

    def __init__(self, name: str, length: int, expectation: str) -> None:
        super().__init__(f"{name} buffer of length {length} is malformed: expected {expectation}.")
        self.name = name
        self.length = length


class PreviewNotReadyError(TerrainEditorError, RuntimeError):
    """The preview was asked to render before its meshes were installed."""


class GenerationError(TerrainEditorError):
    """The external generator could not be loaded or failed to run."""
