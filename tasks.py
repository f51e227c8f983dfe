"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Collection

from dev import code_tasks, net_tasks

# Create the namespace
ns = Collection()

# Code quality tasks at top level: inv lint, inv format, inv test
ns.add_task(code_tasks.lint)
ns.add_task(code_tasks.format_and_check)
ns.add_task(code_tasks.run_tests)

# Add namespaces
ns.add_collection(Collection.from_module(net_tasks), name="net")
