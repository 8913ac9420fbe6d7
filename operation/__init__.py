# operation package
