"""
Explore screen.

Responsibilities:
- Own the per-client browsing state (filters, view mode, viewport).
- Load the catalogue and locate the device concurrently on mount.
- Expose the filtered locations as a list or through the display provider.
"""
