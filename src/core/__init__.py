"""Pure vault logic: strength scoring, brand colours, models, search."""
