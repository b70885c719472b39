"""Qt desktop browser for the feature catalog."""
