"""
The MODEL layer contains pure data structures and editing logic.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with the slope map grid, the contour polygon and their defaults.
"""
