# faasbuild

Helpers for working with serverless functions that are built from language
templates: parsing build arguments, copying files into build folders,
installing templates from a fetched template repository, checking deployment
options and results, merging function environments, and describing deployed
functions as aligned text.

## Install

```
pip install faasbuild
```

For running the test suite:

```
pip install "faasbuild[test]"
pytest
```

## Modules

- `faasbuild.fileops`
  - `copy_files(src, dest)` copies a file or a whole directory tree. Every
    file keeps its permission bits, and missing parent folders of the
    destination are created. With the environment variable `debug` set to
    `1` or `true` each step is printed.
- `faasbuild.buildargs`
  - `parse_build_args(args)` turns `KEY=VALUE` strings into a dict. Keys and
    values are stripped; a missing `=`, an empty key or an empty value raises
    `ValueError`. Repeated `ADDITIONAL_PACKAGE` values are joined with
    spaces; any other repeated key keeps its last value.
  - `validate_parallel(parallel)` returns the depth, or raises `ValueError`
    when it is below 1.
  - `combine_build_opts(yaml_build_opts, flag_build_opts)` merges two option
    lists in order and drops repeats.
- `faasbuild.templates`
  - `move_templates(repo_path, template_name="", overwrite=False,
    template_directory="./template/")` copies language folders from
    `repo_path/template` into the template directory. It returns the
    languages left alone because they already exist and the languages that
    were written. A missing `template` folder raises `FileNotFoundError`.
  - `can_write_language(...)` and `template_folder_exists(...)` make the
    per-language decision, caching it in a dict.
- `faasbuild.deploy_flags`
  - `DeployFlags` holds deployment options (environment, labels,
    annotations, constraints, secrets, `replace`, `update`, read-only root
    filesystem). `validate()` prints a short help text and raises
    `ValueError` when `update` and `replace` are both set.
  - `resource_requests(cpu_request, cpu_limit, memory_request, memory_limit)`
    returns a `(requests, limits)` pair of `FunctionResources`, each `None`
    when none of its values is set.
  - `language_exists_not_dockerfile(language)` is true for a non-empty
    language other than `dockerfile`, in any case.
- `faasbuild.deploy_status`
  - `bad_status_code(code)` is true for anything but 200 and 202.
  - `deploy_failed(status)` raises `DeployFailedError`, naming every failed
    function and its status code, when the mapping is not empty.
- `faasbuild.environment`
  - `read_files(files)` reads the `environment` mapping of each YAML file,
    keeping scalars as written; later files win.
  - `compile_environment(envvar_opts, yaml_environment, file_environment)`
    merges the stack environment, then file environments, then `KEY=VALUE`
    options, each overriding the one before.
- `faasbuild.tls`
  - `check_tls_insecure(gateway, tls_insecure)` returns `NO_TLS_WARN` for a
    plain-HTTP gateway other than `127.0.0.1` or `localhost`, and an empty
    string otherwise or when `tls_insecure` is set.
- `faasbuild.describe`
  - `get_function_urls(gateway, function_name, function_namespace)` returns
    the synchronous and asynchronous invocation URLs.
  - `print_function_description(dst, description, verbose)` writes a
    `FunctionDescription` as aligned text. Empty fields are left out, or
    shown as `<none>` when `verbose` is set. Environment keys are sorted.
  - `generate_map_order(mapping)` returns the keys in sorted order.
- `faasbuild.generate`
  - `filter_store_item(items, from_store)` returns the first store item with
    that name (mapping or object) and raises `LookupError` otherwise.
  - `generate_function_order(functions)` returns function names sorted.
  - `order_knative_env(environment)` returns sorted `EnvPair` values.

## Example

```python
import io

from faasbuild.buildargs import parse_build_args
from faasbuild.describe import FunctionDescription, get_function_urls, print_function_description
from faasbuild.tls import check_tls_insecure

print(parse_build_args(["ADDITIONAL_PACKAGE=jq", "ADDITIONAL_PACKAGE=curl", "NPM_VERSION=0.2.2"]))
# {'ADDITIONAL_PACKAGE': 'jq curl', 'NPM_VERSION': '0.2.2'}

print(get_function_urls("http://127.0.0.1:8080/", "figlet", "alpha"))
# ('http://127.0.0.1:8080/function/figlet.alpha', 'http://127.0.0.1:8080/async-function/figlet.alpha')

print(check_tls_insecure("http://192.168.0.101:8080", False))

out = io.StringIO()
print_function_description(
    out, FunctionDescription(name="figlet", image="figlet:latest", status="Ready"), verbose=False
)
print(out.getvalue())
```

## What it does not do

- It does not run image builds or pushes, does not assemble container build
  command lines, and does not talk to a remote builder.
- It does not clone template repositories; `move_templates` works on a
  repository that is already on disk.
- It does not call a gateway API: deployment helpers only check options and
  interpret status codes you already have.
- It has no command-line program.