#!/usr/bin/env python3

from argparse import ArgumentParser
from os import environ, getcwd, pathsep, walk
from os.path import isfile as is_file, join as path_join
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env['PYTHONPATH'] = pathsep.join(filter(None, [getcwd(), env.get('PYTHONPATH')]))

  ok = True
  for path in walk_ut_files(args.paths):
    print(path)
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_ut_files(paths:list[str]) -> list[str]:
  'Return the sorted `.ut.py` files found at or under `paths`.'
  found:list[str] = []
  for path in paths:
    if is_file(path):
      found.append(path)
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names[:] = [n for n in dir_names if not n.startswith(('.', '_'))]
      found.extend(path_join(dir_path, n) for n in file_names if n.endswith('.ut.py'))
  return sorted(found)


if __name__ == '__main__': main()
