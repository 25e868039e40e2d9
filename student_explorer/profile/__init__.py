"""Static student profile with stats derived from the location catalogue."""
