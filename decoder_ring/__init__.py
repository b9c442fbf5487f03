"""decoder-ring: transcode stdin to stdout with a named, reversible transform."""
