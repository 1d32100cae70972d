#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: colorconverter/__main__.py

from colorconverter.main import main

if __name__ == "__main__":
    main()
