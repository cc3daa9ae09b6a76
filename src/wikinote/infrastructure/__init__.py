"""Infrastructure layer — markdown tokenizer and filesystem adapters."""
