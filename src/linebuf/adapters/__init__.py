"""Host adapters that present a line editor in a UI toolkit."""
