"""
Front-ends that produce styled node trees from CSS and HTML sources.
"""
