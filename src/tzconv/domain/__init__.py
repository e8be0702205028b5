"""Domain types for tzconv: requests, results, error codes, clock."""
