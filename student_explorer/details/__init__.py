"""
Detail screen.

Responsibilities:
- Hold a transient copy of a location's description per open view.
- Run at most one description enhancement per view and drop results
  that arrive after the view was closed.
- Hand reservations off to the messaging app.
"""
