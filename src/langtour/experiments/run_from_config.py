# src/langtour/experiments/run_from_config.py
from __future__ import annotations
import argparse, sys, yaml

def run(demo: str, verbose: bool = False, **kwargs):
    if verbose:
        print(f"Running {demo} with overrides: {kwargs}")
    if demo == "values":
        from langtour.demos.values_demo import main as fn
        return fn(**kwargs)
    if demo == "structs":
        from langtour.demos.structs_demo import main as fn
        return fn(**kwargs)
    raise SystemExit(f"Unknown demo: {demo}")

def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run a langtour demo from a YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)

    with open(args.config, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh)
    if not isinstance(cfg, dict):
        raise ValueError(f"{args.config}: expected a mapping at the top level")

    if "demo" not in cfg:
        raise SystemExit("Missing 'demo' in config")
    demo = cfg["demo"]
    verbose = bool(cfg.get("verbose", False))
    extras = {k: v for k, v in cfg.items() if k not in {"demo", "verbose"}}
    return run(demo=demo, verbose=verbose, **extras)

if __name__ == "__main__":
    raise SystemExit(main())
