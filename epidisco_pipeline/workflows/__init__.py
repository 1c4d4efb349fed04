# -*- coding: utf-8 -*-
"""Composition of the pipeline from the operations of a semantics backend"""
