"""Services: dispatch engine, corpus queries and rendering, offline extraction."""
