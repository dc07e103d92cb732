"""
Entry point for running the demo as a module:
    python -m eitherkit

or after installation:
    eitherkit
"""

from .cli import main

if __name__ == "__main__":
    main()
