"""
Development Runner
==================
Starts rastervis straight from a source checkout, without `pip install`.

Why is this file needed?
------------------------
1. It sits next to 'src/' and puts that directory on 'sys.path', so
   'import rastervis' resolves to the working tree.
2. '--debug' switches logging to DEBUG (every rasterized segment is logged)
   by setting RASTERVIS_LOG_LEVEL before the app configures logging.

Usage:
    $ python run.py [--debug]
"""
import os
import sys

SRC_DIR: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
sys.path.insert(0, SRC_DIR)

if "--debug" in sys.argv:
    sys.argv.remove("--debug")
    os.environ["RASTERVIS_LOG_LEVEL"] = "DEBUG"

from rastervis.main import main  # noqa: E402

if __name__ == "__main__":
    main()
