"""
Index lookup and ranking package.

- index: ``IndexLookup`` protocol and the in-memory collaborator
- json_index: term counts read from a JSON snapshot
- sqlite_index: term counts read from a SQLite table
- index_factory: backend selection from settings
- ranking: ordered listings of a result set
"""
