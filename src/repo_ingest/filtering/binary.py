"""Extension-based binary file detection.

Only the file extension is consulted. Binary content under an unknown
extension is read as text.
"""

import os

BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Images
        "3ds", "3g2", "3gp", "ai", "apng", "avif", "bmp", "cr2", "cur", "dds",
        "dng", "eps", "exr", "fh", "fla", "flif", "fpx", "gif", "heic", "heif",
        "icns", "ico", "ief", "jng", "jp2", "jpeg", "jpg", "jxl", "jxr", "ktx",
        "nef", "pbm", "pct", "pcx", "pgm", "pic", "png", "pnm", "ppm", "psd",
        "psb", "raf", "ras", "raw", "rgb", "rgbe", "sgi", "tga", "tif", "tiff",
        "wbmp", "webp", "xbm", "xcf", "xpm", "xwd",
        # Audio
        "aac", "adp", "aif", "aiff", "amr", "ape", "au", "caf", "dts", "dtshd",
        "ecelp4800", "ecelp7470", "ecelp9600", "eol", "flac", "lvp", "m4a",
        "mid", "mka", "mp2", "mp3", "mp4a", "mpga", "oga", "ogg", "opus", "pya",
        "ra", "rip", "rmi", "s3m", "sil", "snd", "wav", "wax", "weba", "wma",
        "xm",
        # Video
        "avi", "f4v", "fli", "flv", "fvt", "h261", "h263", "h264", "jpgv",
        "m4v", "mj2", "mkv", "mng", "mov", "movie", "mp4", "mpeg", "mpg",
        "mpg4", "mxu", "ogv", "pyv", "qt", "smv", "uvh", "uvm", "uvp", "uvs",
        "uvu", "viv", "vob", "webm", "wm", "wmv", "wmx", "wvx",
        # Archives and compressed data
        "7z", "a", "apk", "ar", "arj", "bz2", "cab", "cpio", "deb", "dmg",
        "egg", "gz", "img", "iso", "jar", "lha", "lz", "lz4", "lzh", "lzma",
        "lzo", "mar", "pea", "rar", "rpm", "rz", "s7z", "sar", "shar", "tar",
        "tbz", "tbz2", "tgz", "tlz", "txz", "war", "whl", "xar", "xpi", "xz",
        "z", "zip", "zipx", "zst",
        # Executables, objects and bytecode
        "bin", "class", "com", "dex", "dll", "dylib", "elc", "exe", "ko",
        "lib", "node", "nupkg", "o", "obj", "pdb", "pyc", "pyd", "pyo", "so",
        "wasm",
        # Fonts
        "eot", "otf", "ttc", "ttf", "woff", "woff2",
        # Documents
        "doc", "docm", "docx", "dot", "dotm", "dotx", "key", "numbers", "odp",
        "ods", "odt", "pages", "pdf", "pot", "potm", "potx", "ppa", "ppam",
        "pps", "ppsm", "ppsx", "ppt", "pptm", "pptx", "xla", "xlam", "xls",
        "xlsb", "xlsm", "xlsx", "xlt", "xltm", "xltx", "xps",
        # Data stores and misc
        "blend", "bpg", "crx", "db", "dcm", "dsk", "dwg", "dxf", "fbx", "gltf",
        "glb", "h5", "hdf5", "keystore", "mobi", "epub", "mdb", "npy", "npz",
        "parquet", "pickle", "pkl", "pt", "sqlite", "sqlite3", "swf", "unity",
        "vsd", "vsdx",
    }
)


def extension_of(path: str) -> str:
    """Return the lower-cased extension of ``path`` without the leading dot.

    Dotfiles such as ``.gitignore`` have no extension.
    """
    _, ext = os.path.splitext(os.path.basename(path))
    return ext[1:].lower()


def is_binary_path(path: str) -> bool:
    """Check whether ``path`` has a known binary extension."""
    return extension_of(path) in BINARY_EXTENSIONS
