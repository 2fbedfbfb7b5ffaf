"""Report formatting: callouts, timestamps and rendering."""
