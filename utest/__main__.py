#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs as make_dirs, walk
from os.path import isdir as is_dir, join as path_join, relpath as rel_path
from subprocess import run
from sys import executable
from typing import Iterable, Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = env.setdefault('UTEST_WORK_DIR', getcwd())
  # Tests run from the build directory, so the project root must be importable explicitly.
  env['PYTHONPATH'] = ':'.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  utest_cwd = '_build/_utest'
  make_dirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_test_files(args.paths):
    print(path)
    exe_path = rel_path(path, utest_cwd)
    c = run([executable, exe_path], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_test_files(paths:Iterable[str]) -> Iterator[str]:
  'Generate the paths of `.ut.py` files in sorted order, skipping hidden names. Paths that are files are yielded unfiltered.'
  for path in paths:
    if not is_dir(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names[:] = sorted(n for n in dir_names if not n.startswith('.'))
      for name in sorted(file_names):
        if name.endswith('.ut.py') and not name.startswith('.'):
          yield path_join(dir_path, name)


if __name__ == '__main__': main()
