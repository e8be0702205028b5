"""Service layer: conversion handler and form wiring."""
