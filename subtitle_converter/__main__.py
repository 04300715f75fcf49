"""Package entry point for ``python -m subtitle_converter``.

Launches the Tkinter GUI. The converter takes no command-line flags.
"""

from subtitle_converter.gui import main

if __name__ == "__main__":
    main()
