"""Docs Markdown modules, loaded by docsmarkdown.main in manifest order."""
