"""Domain layer: concept model, NCIt thesaurus lookup and reconciliation."""
