"""duopane: a small two-pane terminal file manager."""
