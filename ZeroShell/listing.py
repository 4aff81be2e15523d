import os
import shutil
import stat
from dataclasses import dataclass
from datetime import datetime

try:
    import grp
    import pwd
except ImportError:
    # Windows: owners are shown as numeric ids
    grp = pwd = None

from ZeroShell.fileops import resolve_path
from ZeroShell.term import (
    BOLD_BLUE, BOLD_CYAN, BOLD_GREEN, BOLD_RED, colorize, print_error,
)

# Names containing one of these are shown in single quotes
UNSAFE_CHARACTERS = "*?[]$!\"\\;&|<> ()`~#="


@dataclass
class FileInfo:
    name: str
    path: str
    st: os.stat_result


def sort_key(name):
    """ls sắp xếp theo ký tự chữ/số, không phân biệt hoa thường"""
    return "".join(ch for ch in name if ch.isalnum()).lower()


def quote_name(name):
    for ch in name:
        if ch in UNSAFE_CHARACTERS:
            return f"'{name}'"
        if ch == "'":
            return f'"{name}"'
    return name


def is_executable(st):
    return bool(st.st_mode & 0o111)


def classify_suffix(info, long_format):
    """Ký hiệu cho -F"""
    mode = info.st.st_mode
    if stat.S_ISDIR(mode):
        return "/"
    if stat.S_ISLNK(mode):
        # in long format the arrow already marks the link
        return "" if long_format else "@"
    if stat.S_ISREG(mode) and is_executable(info.st):
        return "*"
    if stat.S_ISFIFO(mode):
        return "|"
    if stat.S_ISSOCK(mode):
        return "="
    return ""


def name_color(st):
    if stat.S_ISDIR(st.st_mode):
        return BOLD_BLUE
    if stat.S_ISLNK(st.st_mode):
        return BOLD_CYAN
    if is_executable(st):
        return BOLD_GREEN
    return ""


def format_permissions(info):
    """Return a string like drwxr-xr-x, with + when extended attributes exist."""
    perms = stat.filemode(info.st.st_mode)
    try:
        if os.listxattr(info.path, follow_symlinks=False):
            perms += "+"
    except (AttributeError, OSError):
        pass
    return perms


def format_time(mtime):
    """Mar 10 15:04, or Mar 10  2024 when not from the current year"""
    dt = datetime.fromtimestamp(mtime)
    if dt.year != datetime.now().year:
        return f"{dt:%b} {dt.day:>2}  {dt.year}"
    return f"{dt:%b} {dt.day:>2} {dt:%H:%M}"


def owner_names(st):
    if pwd is None:
        return str(st.st_uid), str(st.st_gid)
    try:
        user = pwd.getpwuid(st.st_uid).pw_name
    except KeyError:
        user = str(st.st_uid)
    try:
        group = grp.getgrgid(st.st_gid).gr_name
    except KeyError:
        group = str(st.st_gid)
    return user, group


def size_field(st):
    if stat.S_ISCHR(st.st_mode) or stat.S_ISBLK(st.st_mode):
        return f"{os.major(st.st_rdev)}, {os.minor(st.st_rdev)}"
    return str(st.st_size)


def link_suffix(info, classify):
    """' -> target' for symlinks in long format"""
    try:
        target = os.readlink(info.path)
    except OSError as e:
        print_error(f"ls: cannot read symbolic link '{info.name}': {e.strerror}")
        return ""
    try:
        target_st = os.stat(info.path)
    except OSError:
        # broken link
        return " -> " + colorize(target, BOLD_RED)
    if classify and stat.S_ISDIR(target_st.st_mode):
        target += "/"
    elif classify and stat.S_ISREG(target_st.st_mode) and is_executable(target_st):
        target += "*"
    return " -> " + colorize(target, name_color(target_st))


def display_name(info, classify, long_format):
    name = quote_name(info.name)
    if classify:
        name += classify_suffix(info, long_format)
    return name


def render_long(infos, classify, with_total):
    rows = []
    for info in infos:
        user, group = owner_names(info.st)
        rows.append([
            format_permissions(info),
            str(info.st.st_nlink),
            user,
            group,
            size_field(info.st),
            format_time(info.st.st_mtime),
            info,
        ])

    widths = [max((len(row[col]) for row in rows), default=0) for col in range(6)]
    lines = []
    if with_total:
        total = sum(getattr(info.st, "st_blocks", 0) // 2 for info in infos)
        lines.append(f"total {total}")
    for perms, links, user, group, size, mtime, info in rows:
        name = display_name(info, classify, long_format=True)
        if stat.S_ISLNK(info.st.st_mode):
            try:
                os.stat(info.path)
                name = colorize(name, BOLD_CYAN)
            except OSError:
                name = colorize(name, BOLD_RED)
            name += link_suffix(info, classify)
        else:
            name = colorize(name, name_color(info.st))
        lines.append(
            f"{perms:<{widths[0]}} {links:>{widths[1]}} {user:<{widths[2]}} "
            f"{group:<{widths[3]}} {size:>{widths[4]}} {mtime:<{widths[5]}} {name}"
        )
    return "\n".join(lines)


def render_columns(infos, classify):
    """Xếp tên theo cột vừa với chiều rộng terminal"""
    if not infos:
        return ""
    names = [display_name(info, classify, long_format=False) for info in infos]
    term_width = shutil.get_terminal_size((80, 24)).columns
    col_width = max(len(name) for name in names) + 2
    count = len(names)

    if count * col_width - 2 <= term_width:
        num_cols, num_rows = count, 1
    else:
        num_cols = max(term_width // col_width, 1)
        num_rows = (count + num_cols - 1) // num_cols

    matrix = [[""] * num_cols for _ in range(num_rows)]
    for i, (info, name) in enumerate(zip(infos, names)):
        padded = f"{name} " if num_rows == 1 else f"{name:<{col_width}}"
        matrix[i % num_rows][i // num_rows] = colorize(padded, name_color(info.st))
    return "\n".join("".join(row) for row in matrix if any(row))


def read_info(name, path):
    return FileInfo(name=name, path=path, st=os.lstat(path))


def list_directory(path, show_all):
    """
    Đọc nội dung thư mục.
    Returns: list of FileInfo sorted the way ls shows them
    """
    infos = []
    if show_all:
        infos.append(FileInfo(".", path, os.stat(path)))
        infos.append(FileInfo("..", os.path.join(path, ".."), os.stat(os.path.join(path, ".."))))

    entries = []
    for name in os.listdir(path):
        if name.startswith(".") and not show_all:
            continue
        try:
            entries.append(read_info(name, os.path.join(path, name)))
        except OSError as e:
            print_error(f"ls: cannot access '{name}': {e.strerror}")
    entries.sort(key=lambda info: sort_key(info.name))
    return infos + entries


def builtin_ls(args, session):
    """
    ls [-a] [-l] [-F] [path...]
    Returns: exit_code
    """
    show_all = long_format = classify = False
    files, dirs = [], []
    status = 0

    for arg in args:
        if arg.startswith("-"):
            for ch in arg[1:]:
                if ch == "a":
                    show_all = True
                elif ch == "l":
                    long_format = True
                elif ch == "F":
                    classify = True
                else:
                    print_error(f"ls: invalid option -- '{ch}'")
                    return 2
            continue

        path = resolve_path(session, arg)
        if os.path.isdir(path):
            dirs.append(arg)
        elif os.path.lexists(path):
            files.append(read_info(arg, path))
        else:
            print_error(f"ls: cannot access '{arg}': No such file or directory")
            status = 1

    if not files and not dirs and status == 0:
        dirs.append(".")

    def render(infos, with_total):
        if long_format:
            return render_long(infos, classify, with_total)
        return render_columns(infos, classify)

    blocks = []
    if files:
        files.sort(key=lambda info: sort_key(info.name))
        blocks.append(render(files, with_total=False))

    dirs.sort(key=sort_key)
    with_headers = len(files) + len(dirs) > 1
    for name in dirs:
        try:
            infos = list_directory(resolve_path(session, name), show_all)
        except PermissionError:
            print_error(f"ls: cannot open directory '{name}': Permission denied")
            status = 1
            continue
        except OSError as e:
            print_error(f"ls: cannot access '{name}': {e.strerror}")
            status = 1
            continue

        text = render(infos, with_total=True)
        if with_headers:
            text = f"{name}:\n{text}"
        blocks.append(text)

    if blocks:
        print("\n\n".join(blocks))
    return status
