"""Pure naming rules: title sanitizing and padding width."""
