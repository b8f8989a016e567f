"""
app/presenters package marker.
"""
