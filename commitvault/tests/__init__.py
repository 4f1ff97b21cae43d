"""
Test suite for the commitment store.

Focus areas:
- Check ordering and error precedence per operation
- No partial writes on rejected calls
- Read views never fail
- Backend atomicity and persistence
"""
