"""
Location display.

Responsibilities:
- Check once per process for the optional interactive map library.
- Render locations as map markers when it is present.
- Degrade to a plain selectable list with a notice when it is not.
"""
