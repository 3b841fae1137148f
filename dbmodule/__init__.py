"""dbmodule.

A small data-access layer over a relational database. SQL text lives outside
the code in a YAML query catalog and is applied generically through
positionally bound statements and row scanning.

High-level architecture
-----------------------

- ``dbmodule.core.database.catalog``: loads the named SQL statements.
- ``dbmodule.core.database.connection``: the single connection handle.
- ``dbmodule.core.database.schema``: ordered drop/create of the tables.
- ``dbmodule.core.database.repositories``: bind records into inserts and
  scan result rows into records.
- ``dbmodule.main``: the demonstration driver wiring everything together.

Typical workflow
----------------

1. Load a ``QueryCatalog``.
2. Open a ``Database`` inside a ``with`` block.
3. Initialize the schema.
4. Insert and select records through the repositories.
"""
