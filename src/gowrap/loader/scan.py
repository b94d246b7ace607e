from __future__ import annotations

import json
import logging
import subprocess
import tempfile
from pathlib import Path

from ..errors import LoadError
from .symbols import LoadResult

logger = logging.getLogger(__name__)


class GoTypeLoader:
    """Type loader backed by the Go toolchain.

    Packages are listed with `go list` and type-checked with `go/types` by a
    small scanner program compiled on the fly with `go run`.
    """

    def __init__(self, *, work_dir: Path | None = None) -> None:
        self.work_dir = (work_dir or Path.cwd()).resolve()

    def load(self, pattern: str, *, type_name: str | None = None) -> LoadResult:
        return scan_packages(pattern=pattern, work_dir=self.work_dir, type_name=type_name)

    def package_name(self, directory: Path) -> str:
        out = _run_go(["go", "list", "-json", "."], cwd=directory)
        try:
            info = json.loads(out)
        except Exception as e:  # noqa: BLE001
            raise LoadError(f"failed to parse go list output for {directory}: {e}\n{out}") from e
        name = info.get("Name") if isinstance(info, dict) else None
        if not isinstance(name, str) or not name:
            raise LoadError(f"no Go package found in {directory}")
        return name


def scan_packages(*, pattern: str, work_dir: Path, type_name: str | None = None) -> LoadResult:
    """Run the Go scanner for `pattern` from `work_dir` and parse its output."""
    work_dir = work_dir.resolve()

    with tempfile.TemporaryDirectory(prefix="gowrap-goscan-") as td:
        scan_dir = Path(td)
        (scan_dir / "go.mod").write_text(
            "\n".join(
                [
                    "module gowrap.goscan",
                    "",
                    "go 1.18",
                    "",
                ]
            ),
            encoding="utf-8",
        )
        (scan_dir / "main.go").write_text(_scanner_go_source(), encoding="utf-8")

        cmd = ["go", "run", ".", "--dir", str(work_dir), "--pattern", pattern]
        if type_name:
            cmd += ["--type", type_name]
        logger.debug("scanning %s from %s", pattern, work_dir)
        out = _run_go(cmd, cwd=scan_dir)

    try:
        obj = json.loads(out)
    except Exception as e:  # noqa: BLE001
        raise LoadError(f"failed to parse go scan output: {e}\n{out}") from e

    result = LoadResult.from_json(obj)
    logger.debug("loaded packages: %s", ", ".join(p.path for p in result.packages))
    return result


def _run_go(cmd: list[str], *, cwd: Path) -> str:
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=False,
            check=False,
        )
    except FileNotFoundError as e:
        raise LoadError(
            "Go toolchain not found (`go` is missing from PATH). "
            "Install Go and ensure `go` is available on PATH."
        ) from e

    stdout = (proc.stdout or b"").decode("utf-8", errors="replace")
    stderr = (proc.stderr or b"").decode("utf-8", errors="replace")
    if proc.returncode != 0:
        out = "\n".join([s for s in [stdout.strip("\n"), stderr.strip("\n")] if s])
        raise LoadError(f"command failed: {' '.join(cmd)}\n{out}")
    return stdout


def _scanner_go_source() -> str:
    # Keep this file stdlib-only so `go run` doesn't need network access.
    return r'''
package main

import (
	"bytes"
	"encoding/json"
	"errors"
	"flag"
	"fmt"
	"go/ast"
	"go/importer"
	"go/parser"
	"go/token"
	"go/types"
	"io"
	"os"
	"os/exec"
	"path/filepath"
)

type goListPkg struct {
	ImportPath string
	Name       string
	Dir        string
	GoFiles    []string
}

type outIfaceMethod struct {
	Name    string   `json:"name"`
	Params  []string `json:"params"`
	Results []string `json:"results"`
}

type outVar struct {
	Name      string           `json:"name"`
	Type      string           `json:"type"`
	Interface []outIfaceMethod `json:"interface"`
}

type outMethod struct {
	Name     string   `json:"name"`
	Params   []outVar `json:"params"`
	Results  []outVar `json:"results"`
	Variadic bool     `json:"variadic"`
}

type outType struct {
	Name           string      `json:"name"`
	Interface      bool        `json:"interface"`
	Methods        []outMethod `json:"methods"`
	PointerMethods []outMethod `json:"pointer_methods"`
}

type outPkg struct {
	Name  string    `json:"name"`
	Path  string    `json:"path"`
	Types []outType `json:"types"`
}

type outObj struct {
	Packages []outPkg `json:"packages"`
}

// Always qualify with the package name; the caller drops its own qualifier.
func qualifier(p *types.Package) string {
	return p.Name()
}

func main() {
	var dir, pattern, typeName string
	flag.StringVar(&dir, "dir", "", "directory to resolve the pattern from")
	flag.StringVar(&pattern, "pattern", ".", "package pattern")
	flag.StringVar(&typeName, "type", "", "only report this type")
	flag.Parse()

	if dir != "" {
		if err := os.Chdir(dir); err != nil {
			fmt.Fprintf(os.Stderr, "chdir: %v\n", err)
			os.Exit(2)
		}
	}
	if pattern == "" {
		pattern = "."
	}

	pkgs, err := listPkgs(pattern)
	if err != nil {
		fmt.Fprintln(os.Stderr, err.Error())
		os.Exit(1)
	}

	out := outObj{Packages: make([]outPkg, 0, len(pkgs))}
	for _, p := range pkgs {
		tpkg, err := check(p)
		if err != nil {
			fmt.Fprintln(os.Stderr, err.Error())
			os.Exit(1)
		}
		op := outPkg{Name: p.Name, Path: p.ImportPath, Types: []outType{}}
		scope := tpkg.Scope()
		for _, name := range scope.Names() {
			if typeName != "" && name != typeName {
				continue
			}
			tn, ok := scope.Lookup(name).(*types.TypeName)
			if !ok || !tn.Exported() {
				continue
			}
			tt := tn.Type()
			op.Types = append(op.Types, outType{
				Name:           name,
				Interface:      types.IsInterface(tt),
				Methods:        methodSet(tt),
				PointerMethods: methodSet(types.NewPointer(tt)),
			})
		}
		out.Packages = append(out.Packages, op)
	}

	enc := json.NewEncoder(os.Stdout)
	enc.SetEscapeHTML(false)
	_ = enc.Encode(out)
}

func listPkgs(pattern string) ([]goListPkg, error) {
	cmd := exec.Command("go", "list", "-json", pattern)
	var stdout, stderr bytes.Buffer
	cmd.Stdout = &stdout
	cmd.Stderr = &stderr
	if err := cmd.Run(); err != nil {
		return nil, fmt.Errorf("go list failed: %v\n%s", err, stderr.String())
	}

	dec := json.NewDecoder(&stdout)
	pkgs := []goListPkg{}
	for {
		var p goListPkg
		if err := dec.Decode(&p); err != nil {
			if errors.Is(err, io.EOF) {
				break
			}
			return nil, fmt.Errorf("failed to decode go list json: %v", err)
		}
		pkgs = append(pkgs, p)
	}
	return pkgs, nil
}

func check(p goListPkg) (*types.Package, error) {
	fset := token.NewFileSet()
	files := make([]*ast.File, 0, len(p.GoFiles))
	for _, fn := range p.GoFiles {
		af, err := parser.ParseFile(fset, filepath.Join(p.Dir, fn), nil, 0)
		if err != nil {
			return nil, fmt.Errorf("parse %s: %v", fn, err)
		}
		files = append(files, af)
	}

	conf := types.Config{
		Importer: importer.ForCompiler(fset, "source", nil),
		// Keep going on errors (e.g. cgo files we did not parse); the scope is still usable.
		Error: func(error) {},
	}
	tpkg, _ := conf.Check(p.ImportPath, fset, files, nil)
	if tpkg == nil {
		return nil, fmt.Errorf("type check %s failed", p.ImportPath)
	}
	return tpkg, nil
}

func methodSet(t types.Type) []outMethod {
	mset := types.NewMethodSet(t)
	out := make([]outMethod, 0, mset.Len())
	for i := 0; i < mset.Len(); i++ {
		s := mset.At(i)
		sig, ok := s.Type().(*types.Signature)
		if !ok {
			continue
		}
		out = append(out, outMethod{
			Name:     s.Obj().Name(),
			Params:   tupleVars(sig.Params()),
			Results:  tupleVars(sig.Results()),
			Variadic: sig.Variadic(),
		})
	}
	return out
}

func tupleVars(t *types.Tuple) []outVar {
	out := make([]outVar, 0, t.Len())
	for i := 0; i < t.Len(); i++ {
		v := t.At(i)
		ov := outVar{Name: v.Name(), Type: types.TypeString(v.Type(), qualifier)}
		if iface, ok := v.Type().Underlying().(*types.Interface); ok {
			ov.Interface = make([]outIfaceMethod, 0, iface.NumMethods())
			for j := 0; j < iface.NumMethods(); j++ {
				m := iface.Method(j)
				msig := m.Type().(*types.Signature)
				ov.Interface = append(ov.Interface, outIfaceMethod{
					Name:    m.Name(),
					Params:  tupleTypes(msig.Params()),
					Results: tupleTypes(msig.Results()),
				})
			}
		}
		out = append(out, ov)
	}
	return out
}

func tupleTypes(t *types.Tuple) []string {
	out := make([]string, 0, t.Len())
	for i := 0; i < t.Len(); i++ {
		out = append(out, types.TypeString(t.At(i).Type(), qualifier))
	}
	return out
}
'''
