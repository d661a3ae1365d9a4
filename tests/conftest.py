pytest_plugins = ["dotpath.testing"]
