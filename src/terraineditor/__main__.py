"""Command-line interface."""
from terraineditor.main import main

if __name__ == "__main__":
    main()
