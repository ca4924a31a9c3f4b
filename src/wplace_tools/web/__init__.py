"""HTTP interface to the wplace tools."""
