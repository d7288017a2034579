"""Display-layer bridge over the note store."""
