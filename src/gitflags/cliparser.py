from argparse import ArgumentParser, RawDescriptionHelpFormatter

from . import __version__
from .flags import FLAGS


def flags_epilog():
    lines = ['git flags (may be repeated, run in order of first use):']
    for definition in FLAGS.values():
        lines.append('  ' + definition.usage.replace(' \n ', '\n      '))
    return '\n'.join(lines)


def build_parser():
    # Unknown tokens are left for the dispatcher, so no abbreviations
    parser = ArgumentParser(
        'gitflags',
        description='Run git commands given as --flag=value arguments',
        epilog=flags_epilog(),
        formatter_class=RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Print the commands built for each flag')
    parser.add_argument('-n', '--dry-run', action='store_true', help='Print the commands without running them')
    parser.add_argument('-C', dest='directory', default=None, help='Run git in this directory')

    return parser
