#!/usr/bin/env python3
"""
Chunking package for text processing.

This package provides pure splitting logic that turns long texts into
bounded-size chunks ready for embedding.
"""
