"""Command-line interface for zwagit"""
import argparse, logging, sys

from .codec import BLOB, decode
from .errors import ZwagitError
from .repo import Repo


def _read_input(repo, path, kind, write):
    if path == '-':
        return repo.hash_object(sys.stdin.buffer.read(), kind=kind, write=write)
    return repo.hash_file(path, kind=kind, write=write)


def _cat_file(repo, args):
    raw = repo.objects.get(args.object)
    out = sys.stdout.buffer
    if args.mode == 'raw':
        out.write(raw)
    else:
        obj = decode(raw)
        if args.mode == 'type':
            out.write(obj.kind.encode() + b'\n')
        elif args.mode == 'size':
            out.write(b'%d\n' % obj.length)
        else:
            out.write(obj.content)
    out.flush()


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(prog='zwagit', description='A mini Git-like version control system.')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug output')
    sub = parser.add_subparsers(dest='cmd')

    sub.add_parser('init', help='create an empty repository')

    p_hash = sub.add_parser('hash-object', help='store a file as an object and print its id')
    p_hash.add_argument('file', help="path to read, or '-' for stdin")
    p_hash.add_argument('-t', '--type', dest='kind', default=BLOB, help='object kind (default: blob)')
    p_hash.add_argument('--no-write', dest='write', action='store_false', help='only compute the id')

    p_cat = sub.add_parser('cat-file', help='print a stored object')
    p_cat.add_argument('object')
    mode = p_cat.add_mutually_exclusive_group()
    mode.add_argument('-p', dest='mode', action='store_const', const='content', help='content only (default)')
    mode.add_argument('--raw', dest='mode', action='store_const', const='raw', help='stored envelope bytes')
    mode.add_argument('-t', dest='mode', action='store_const', const='type', help='object kind')
    mode.add_argument('-s', dest='mode', action='store_const', const='size', help='content length')
    p_cat.set_defaults(mode='content')

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    repo = Repo('.')

    try:
        if args.cmd == 'init':
            if repo.init(): print(f'Initialized empty zwagit repository in {repo.git_dir}')
            else: print('Repository already initialized.')
            return 0
        if args.cmd == 'hash-object':
            print(_read_input(repo, args.file, args.kind, args.write)); return 0
        if args.cmd == 'cat-file':
            _cat_file(repo, args); return 0
    except ZwagitError as e:
        print(f'zwagit: error: {e}', file=sys.stderr)
        return e.exit_code

    parser.print_help(); return 2


if __name__ == '__main__':
    raise SystemExit(main())
