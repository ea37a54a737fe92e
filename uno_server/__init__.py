"""HTTP service exposing UNO games."""
