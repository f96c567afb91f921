"""
Check the status of several files with one request
"""
from rapidshare import RapidshareClient

FILES = [
    "https://rapidshare.com/files/829628035/HornyRhinos.jpg",
    "https://rapidshare.com/files/428232373/HappyHippos.jpg",
    "https://rapidshare.com/files/766059293/ElegantElephants.jpg",
]


def main():
    # Free users can check files without logging in
    with RapidshareClient(free_user=True) as rs:
        for info in rs.check_files(FILES):
            print(f"{info.file_name}: {info.status.value} ({info.file_size} bytes)")
            if info.is_ok:
                print(f"  -> {info.download_url}")


if __name__ == "__main__":
    main()
