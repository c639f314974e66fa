"""Internal APIs for appear. Not covered by any compatibility promise."""
