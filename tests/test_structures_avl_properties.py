"""
Propriedades da AVL verificadas com sequências aleatórias:
- Balanceamento, altura em cache e ordenação após CADA inserção
- Preservação do conteúdo (in-order == multiconjunto ordenado)
- Limite de altura 1.44 * log2(n + 2) - 0.328
"""
import sys
import os
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.structures.avl_validator import AVLValidator

SEEDS = [0, 1, 7, 42, 2024]

def test_invariants_hold_after_every_insertion():
    print("--- Invariantes após cada inserção (sequências aleatórias) ---")

    for seed in SEEDS:
        rng = np.random.default_rng(seed)
        values = rng.permutation(300).tolist()
        avl = AVLTree()

        for count, value in enumerate(values, start=1):
            avl.insert(value)
            violations = AVLValidator.find_violations(avl.root)
            assert not violations, f"seed={seed}, após {count} inserções: {violations}"

        print(f"  seed={seed}: altura final {avl.get_tree_height()} para n={len(values)}")

    print(">> SUCESSO: Nenhuma invariante quebrada.")

def test_invariants_hold_with_duplicates():
    for seed in SEEDS:
        rng = np.random.default_rng(seed)
        # Faixa pequena força muitas repetições
        values = rng.integers(0, 15, size=200).tolist()
        avl = AVLTree()

        for value in values:
            avl.insert(value)
            assert AVLValidator.is_valid(avl.root), f"seed={seed}: árvore inválida com duplicatas"

        assert avl.get_all_values() == sorted(values)
        assert len(avl) == len(values)

def test_content_is_preserved():
    for seed in SEEDS:
        rng = np.random.default_rng(seed)
        values = rng.integers(-1000, 1000, size=500).tolist()
        avl = AVLTree()
        for value in values:
            avl.insert(value)

        assert avl.get_all_values() == sorted(values), f"seed={seed}: conteúdo divergente"
        for value in values[:50]:
            assert value in avl

def test_height_respects_avl_bound():
    print("--- Limite de altura da AVL ---")
    sizes = [1, 2, 10, 100, 1000, 4000]

    for n in sizes:
        bound = AVLValidator.max_avl_height(n)

        ascending = AVLTree()
        for value in range(n):
            ascending.insert(value)

        rng = np.random.default_rng(n)
        shuffled = AVLTree()
        for value in rng.permutation(n).tolist():
            shuffled.insert(value)

        print(f"  n={n:5d}: crescente={ascending.get_tree_height()}, "
              f"aleatória={shuffled.get_tree_height()}, limite={bound:.2f}")
        assert ascending.get_tree_height() <= bound
        assert shuffled.get_tree_height() <= bound
        # Nunca abaixo do mínimo possível para uma árvore binária
        assert ascending.get_tree_height() >= int(np.floor(np.log2(n)))

    print(">> SUCESSO: Alturas dentro do limite teórico.")

def test_every_rotation_case_is_exercised():
    rng = np.random.default_rng(3)
    avl = AVLTree()
    for value in rng.permutation(500).tolist():
        avl.insert(value)

    rotations = avl.get_statistics()['rotations']
    for case, count in rotations.items():
        assert count > 0, f"Caso {case} nunca foi exercitado"

if __name__ == "__main__":
    test_invariants_hold_after_every_insertion()
    test_height_respects_avl_bound()
