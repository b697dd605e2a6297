"""Reality.eth protocol helpers: templates, answer codec, question text, bonds."""
