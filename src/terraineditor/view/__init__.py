"""
The VIEW layer: Qt widgets, canvases and the PyVista preview.
"""
