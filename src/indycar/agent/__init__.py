"""Entrypoint host exposing the IndyCar views as priced calls."""
