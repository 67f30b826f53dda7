# (c) Copyright IBM Corp. 2025

# Module version file.  Read by setup.py.

VERSION = "1.0.0"
