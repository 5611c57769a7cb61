"""Mermaid flowcharts: nodes, links, subgraphs, styles and class definitions."""