"""Application-level core for HBaseSearch."""
