"""Outbound ports"""
