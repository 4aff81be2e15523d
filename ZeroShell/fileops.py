import os
import shutil

from ZeroShell.term import print_error


def resolve_path(session, path):
    """Resolve path relative to the shell's current directory."""
    return os.path.join(session.current_directory, path)


def builtin_cp(args, session):
    """
    Copy files: cp SRC DST or cp SRC... DIR
    Returns: exit_code
    """
    if len(args) < 2:
        print_error("cp: wrong number of arguments")
        return 1

    dst = resolve_path(session, args[-1])
    if len(args) > 2 and not os.path.isdir(dst):
        print_error(f"cp: target '{args[-1]}' is not a directory")
        return 1

    for src_arg in args[:-1]:
        src = resolve_path(session, src_arg)
        if not os.path.exists(src):
            print_error(f"cp: cannot stat '{src_arg}': No such file or directory")
            continue
        if os.path.isdir(src):
            print_error(f"cp: -r not specified; omitting directory '{src_arg}'")
            continue

        final_dst = dst
        if os.path.isdir(dst):
            final_dst = os.path.join(dst, os.path.basename(os.path.normpath(src)))
        try:
            shutil.copy(src, final_dst)
        except shutil.SameFileError:
            print_error(f"cp: '{src_arg}' and '{args[-1]}' are the same file")
        except OSError as e:
            print_error(f"cp: cannot copy '{src_arg}': {e.strerror or e}")
    return 0


def builtin_mv(args, session):
    """
    Move or rename files: mv SRC DST or mv SRC... DIR
    Returns: exit_code
    """
    if not args:
        print_error("mv: missing file operand")
        return 1
    if len(args) == 1:
        print_error(f"mv: missing destination file operand after '{args[0]}'")
        return 1

    last = resolve_path(session, args[-1])
    sources = args[:-1]
    if len(sources) > 1 and not os.path.isdir(last):
        print_error(f"mv: target '{args[-1]}' is not a directory")
        return 1

    for src_arg in sources:
        if not src_arg.strip():
            continue

        src = resolve_path(session, src_arg)
        if not os.path.lexists(src):
            print_error(f"mv: cannot stat '{src_arg}': No such file or directory")
            continue

        dst = last
        if os.path.isdir(last):
            name = os.path.basename(os.path.normpath(src))
            if name in ("", ".", ".."):
                print_error(f"mv: cannot move '{src_arg}': invalid file name")
                continue
            dst = os.path.join(last, name)

        if os.path.exists(dst) and os.path.samefile(src, dst):
            print_error(f"mv: '{src_arg}' and '{dst}' are the same file")
            continue

        try:
            os.rename(src, dst)
        except OSError:
            # e.g. across filesystems: copy then remove
            try:
                shutil.move(src, dst)
            except OSError as e:
                print_error(f"mv: cannot move '{src_arg}' to '{dst}': {e.strerror or e}")
    return 0


def builtin_rm(args, session):
    """
    Remove files, or directories with -r.
    Returns: exit_code
    """
    recursive = False
    paths = []
    for arg in args:
        if arg == "-r":
            recursive = True
        else:
            paths.append(arg)

    if not paths:
        print_error("rm: missing operand")
        return 1

    for arg in paths:
        parts = [part for part in arg.split("/") if part]
        if not parts or parts[-1] in (".", ".."):
            print_error(f"rm: refusing to remove '.' or '..' directory: skipping '{arg}'")
            continue

        target = os.path.normpath(resolve_path(session, arg))
        try:
            if os.path.isdir(target) and not os.path.islink(target):
                if not recursive:
                    print_error(f"rm: cannot remove '{arg}': Is a directory")
                    continue
                shutil.rmtree(target)
            else:
                os.remove(target)
        except OSError as e:
            print_error(f"rm: cannot remove '{arg}': {e.strerror or e}")
    return 0
