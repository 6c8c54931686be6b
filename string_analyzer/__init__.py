"""String Analyzer Service: store strings and query their computed properties."""
