"""Mermaid state diagrams: states, notes and transitions."""