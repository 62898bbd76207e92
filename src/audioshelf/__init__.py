# ABOUTME: audioshelf - a terminal browser for ALE audiobook library exports.
# ABOUTME: Core engine lives in core/, record types in catalog/, file reading in formats/.
