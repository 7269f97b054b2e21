# Standard Library
import os
import sys


def pytest_addoption(parser):
	parser.addoption(
		"--save",
		action="store_true",
		default=False,
		help="Save rendered outputs to the current working directory",
	)


def repo_root():
	root = _find_repo_root(os.path.dirname(os.path.abspath(__file__)))
	if not root:
		raise RuntimeError("repo root could not be resolved from the tests directory")
	return root


#============================================
def tests_root():
	return os.path.join(repo_root(), "tests")


#============================================
def tests_path(*parts):
	return os.path.join(tests_root(), *parts)


#============================================
def _find_repo_root(start_dir):
	current = os.path.abspath(start_dir)
	while True:
		if _looks_like_repo_root(current):
			return current
		parent = os.path.dirname(current)
		if parent == current:
			return ""
		current = parent


#============================================
def _looks_like_repo_root(path):
	if not path:
		return False
	if not os.path.isdir(path):
		return False
	if not os.path.isfile(os.path.join(path, "pyproject.toml")):
		return False
	if not os.path.isdir(os.path.join(path, "packages", "plasmid_map")):
		return False
	return True


def add_plasmid_map_to_sys_path():
	root = repo_root()
	package_dir = os.path.join(root, "packages", "plasmid_map")
	if package_dir not in sys.path:
		sys.path.insert(0, package_dir)
	return root
