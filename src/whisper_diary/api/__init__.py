"""HTTP API: upload two CSV exports, get the merged transcript."""
