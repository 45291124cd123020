"""Word Scramble: spell shorter words from the letters of a root word."""
