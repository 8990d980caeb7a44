"""Text layer, inference engine and artifact assembler."""
