"""
Side panels of the main window: the two editors and the generation controls.
"""
