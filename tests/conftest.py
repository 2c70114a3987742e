import os

# Keep telelog quiet on the console while the suite runs.
os.environ.setdefault("QUICKNOTE_DISABLE_CONSOLE", "1")
os.environ.setdefault("QUICKNOTE_LOG_LEVEL", "WARNING")
