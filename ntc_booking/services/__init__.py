"""Remote booking service operations."""
