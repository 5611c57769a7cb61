"""Mermaid sequence diagrams: actors, messages and notes."""