"""Cell parsing and identifier helpers shared by the importer and the store."""
