"""Path resolution, link building and content loading."""
