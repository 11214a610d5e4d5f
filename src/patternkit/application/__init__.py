"""Console drivers for the pattern demonstrations"""
