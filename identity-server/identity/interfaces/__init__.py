"""HTTP and other transport adapters."""
