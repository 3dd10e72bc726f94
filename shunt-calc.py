#!/usr/bin/env python3

import logging

from shuntcalc import main, load_config

if __name__ == '__main__':
    config = load_config()
    logging.basicConfig(level=config['log_level'].upper())
    main(config)
