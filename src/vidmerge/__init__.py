"""vidmerge — concatenate videos with generated title-card transitions.

Sources are read from a config file (explicit list or a scanned
directory), a "Next: <name>" card is rendered between consecutive
videos, and ffmpeg joins everything into one output file.
"""
