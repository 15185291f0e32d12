"""Transform file that fails while loading."""

raise RuntimeError("transform file is broken")
