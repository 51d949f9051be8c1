"""Graph construction, degree counting and traversal."""
