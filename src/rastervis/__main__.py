"""Command-line interface: python -m rastervis"""
from rastervis.main import main

if __name__ == "__main__":
    main()
