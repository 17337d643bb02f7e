"""Pattern persistence, indexing, versioning and the binary file format."""