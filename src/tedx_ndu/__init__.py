"""TEDx NDU event site backend"""
