"""
commitvault CLI

Commands:
- register / update / delegate - Commitment lifecycle
- deadline / priority / acknowledge - Satellite records
- inspect / analytics / metadata / deadline-status / health - Read views
- purge - Remove all records for the caller
- export - Dump persisted state
"""
