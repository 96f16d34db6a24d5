"""rwc - count bytes, characters, words and lines in files."""
