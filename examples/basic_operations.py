# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from objectstore.client.session import Session
from objectstore.directory import Bucket
import uuid

def main():
    # Connect using OBJECTSTORE_* environment variables (in-memory by default)
    bucket = Bucket.connect(Session.from_env())

    # Create a directory
    name = f"my-test-dir-{uuid.uuid4()}"
    directory = bucket.create_directory(name)
    print(f"Created directory: {directory}")

    try:
        # Upload an object with tags
        data = b"Hello, World!"
        directory.put_bytes("hello.txt", data, {"example.io/owner": "docs"})
        print("Uploaded object: hello.txt")

        # Download the object
        downloaded, tags = directory.get_bytes("hello.txt")
        print(f"Downloaded content: {downloaded.decode()}")
        print(f"Tags: {tags}")

        # Create a nested directory and list the tree
        directory.create_directory("nested").put_bytes("inner.txt", b"inner")
        print("Objects in directory:")
        for obj in directory.list_objects():
            print(f"- {obj}")
        print("Directories in directory:")
        for child_name, child in directory.list_directories().items():
            print(f"- {child_name} ({child.path})")

        # Delete the object
        directory.delete("hello.txt")
        print("Deleted object: hello.txt")

    finally:
        # Delete the directory and everything below it
        directory.delete_directory()
        print(f"Deleted directory: {directory}")

if __name__ == "__main__":
    main()
