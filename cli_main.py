# cli_main.py
import sys
import os

# Add the project root to the Python path to allow for absolute imports
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from presentation.main import run


def main():
    run()


if __name__ == "__main__":
    main()
