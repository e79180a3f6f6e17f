"""Infrastructure layer: HTTP adapters for the ports and table export."""
