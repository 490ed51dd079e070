"""Core package of filecrypt: envelope format, file I/O and the encrypt/decrypt pipelines."""
