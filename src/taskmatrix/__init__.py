"""taskmatrix - Eisenhower matrix task analysis."""
