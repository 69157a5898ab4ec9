# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from objectstore.client.exceptions import NotFoundError, ObjectStoreError
from objectstore.client.session import Session
from objectstore.directory import Bucket
from objectstore.output import print_output, validate_key
from objectstore.utils import configure_logging
import os
import uuid

def main():
    configure_logging()
    bucket = Bucket.connect(Session.from_env())

    # Create a directory with error handling
    try:
        backups = bucket.create_directory(f"backups-{uuid.uuid4()}")
    except ObjectStoreError as e:
        print(f"Failed to create directory: {e}")
        return

    try:
        # Stream a large file into the directory
        test_data = b"Sample data for large file upload." * 1024
        try:
            with open("large_file.dat", "wb") as f:
                f.write(test_data)

            with open("large_file.dat", "rb") as f:
                backups.put("large_file.dat", f, os.path.getsize("large_file.dat"),
                            {"backup.io/source": "large_file.dat"})
        finally:
            if os.path.exists("large_file.dat"):
                os.remove("large_file.dat")

        # Stream it back without loading it all at once
        stream, tags = backups.get("large_file.dat")
        try:
            total = 0
            while True:
                chunk = stream.read(64 * 1024)
                if not chunk:
                    break
                total += len(chunk)
        finally:
            stream.close()
        print(f"Read back {total} bytes with tags {tags}")

        # Reopen the directory from its string form
        reopened = bucket.open_directory(str(backups))
        print(f"Reopened {reopened.path}, objects: {reopened.list_objects()}")

        # Lookups of missing directories fail
        try:
            backups.get_directory("does-not-exist")
        except NotFoundError as e:
            print(f"Expected lookup failure: {e}")

        # Report the directory to a supervising process
        validate_key("backup_path")
        print_output("backup_path", str(backups))

    finally:
        try:
            backups.delete_directory()
        except ObjectStoreError as e:
            print(f"Failed to delete directory: {e}")

if __name__ == "__main__":
    main()
