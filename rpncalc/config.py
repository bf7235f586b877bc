'''Default settings for the command line front end'''

import os

CALC_CONFIG = {
    'debug': False,
    'log_level': 'WARNING',
    'log_format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'prompt': 'calc> ',
    'example': '2 * 4 + 3 * 2',  # 원본 프로그램의 예제
}

TRUTHY = {'1', 'true', 'yes', 'on'}


def load_config(environ=None):
    '''
    Returns a copy of CALC_CONFIG with RPNCALC_* environment overrides
    '''
    environ = os.environ if environ is None else environ
    config = dict(CALC_CONFIG)
    if 'RPNCALC_DEBUG' in environ:
        config['debug'] = environ['RPNCALC_DEBUG'].strip().lower() in TRUTHY
    if environ.get('RPNCALC_LOG_LEVEL'):
        config['log_level'] = environ['RPNCALC_LOG_LEVEL'].strip().upper()
    return config
